"""Application layer (use cases + bootstrap seed)"""
