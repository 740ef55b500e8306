from .q_table_manager import QTableManager

__all__ = ["QTableManager"]
