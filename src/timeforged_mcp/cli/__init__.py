"""
CLI commands.
"""
