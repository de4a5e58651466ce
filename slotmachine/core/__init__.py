"""
Core domain models, money arithmetic, and configuration contracts.

This module contains the building blocks that are independent
of the console (input, colors, prompts).
"""
