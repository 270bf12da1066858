"""
repositories/ - State Layer
===========================
Each repository owns one piece of per-user state kept in process memory.
All access goes through the repository's locks; nothing survives a restart.
"""
