"""
Utility modules: local configuration and logging.
"""
