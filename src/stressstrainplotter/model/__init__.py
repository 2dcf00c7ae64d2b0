"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the plotting (PyQtGraph).
It deals with sample parsing, derived quantities and script text.
"""
