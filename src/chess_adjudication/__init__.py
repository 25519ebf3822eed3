"""Chess adjudication rule analyzer."""

__version__ = "0.1.0"
