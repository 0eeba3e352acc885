"""
The MODEL layer contains pure data structures and the mechanics formulas.
It has NO knowledge of I/O, scheduling or other bodies.
It deals with Vectors, Forces and Physical Bodies.
"""
