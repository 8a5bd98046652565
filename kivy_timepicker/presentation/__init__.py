"""
Kivy views for the time picker.
"""
