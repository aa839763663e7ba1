"""Domain layer — the field model, its wire mapping, and content rules.

This layer depends only on stdlib and pydantic.
It must never import from config.
"""
