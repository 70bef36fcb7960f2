"""
Services - business logic separated from the CLI.

Each service handles one command: init, add, sync, list.
"""

from ai_dev_system.services.init_service import run_init
from ai_dev_system.services.add_service import run_add
from ai_dev_system.services.sync_service import run_sync
from ai_dev_system.services.list_service import run_list

__all__ = ["run_init", "run_add", "run_sync", "run_list"]
