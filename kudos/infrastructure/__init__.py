"""Infrastructure layer (in-memory stores, event distribution, notifiers)"""
