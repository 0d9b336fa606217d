"""Host platform plugins"""
