"""
keyboards/ - Markup Builders
============================
Pure functions that build inline and reply keyboards.
Nothing here reads or changes user state.
"""
