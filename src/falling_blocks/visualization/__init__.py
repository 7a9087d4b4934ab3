"""pygame front end: renderer, keyboard input and the gravity timer."""
