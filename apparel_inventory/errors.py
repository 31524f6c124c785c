class InventoryStoreError(Exception):
    """Raised when the inventory store cannot load or save the catalog."""
