"""
Configuration loaded from the environment and .env files.
"""
