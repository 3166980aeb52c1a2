"""Rendering: components, pages and the publishers that serialize them."""
