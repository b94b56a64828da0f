"""Built-in plugins shipped with storefront."""
