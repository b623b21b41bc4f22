"""BCS-serializable Sui transaction types: addresses, type tags, arguments, commands and transaction data."""

__version__ = "0.1.0"

__all__ = ["address", "arguments", "bcs", "commands", "transaction", "typetag"]