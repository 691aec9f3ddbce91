"""Host adapters that drive the editor from a real terminal."""
