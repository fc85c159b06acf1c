"""Domain models for instruments and trades"""
