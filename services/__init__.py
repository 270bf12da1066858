"""
services/ - Business Logic Layer
================================
Screen rendering, course pagination and the update processing loop.
Services build Actions; they never talk to Telegram directly.
"""
