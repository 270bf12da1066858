"""
transport/ - Messaging Platform Layer
=====================================
The only layer that talks to Telegram. Converts raw platform updates into
models.update variants and executes models.action values.
"""
