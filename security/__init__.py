"""
security/ - Access Control
==========================
Admin identity checks for privileged commands.
"""
