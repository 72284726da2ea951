"""Django project package for the carelink clinical coordination backend."""
