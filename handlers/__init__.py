"""
handlers/ - Presentation Layer
================================
Update handlers. Each handler receives one classified Update, consults the
repositories and services, and returns the Actions to send back.
No Telegram I/O happens here.
"""
