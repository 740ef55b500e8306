from .base_q_table_manager import BaseQTableManager

__all__ = ["BaseQTableManager"]
