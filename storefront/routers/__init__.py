"""HTTP routers for the storefront view layer."""
