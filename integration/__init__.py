"""
LibCirc Integration Layer
============================
Drivers that sit outside the engines and call them in a fixed order.
"""
