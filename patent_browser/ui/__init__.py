"""
Dash adapter layer: app factory, layout builders and callbacks.
"""
