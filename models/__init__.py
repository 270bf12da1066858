"""
models/ - Domain Layer
======================
Plain data types shared by every layer: inbound updates, outbound actions,
the course catalog, navigation snapshots and the error hierarchy.
No Telegram I/O happens here.
"""
