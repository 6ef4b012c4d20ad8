"""Storefront: authentication, product catalogue and order placement."""
