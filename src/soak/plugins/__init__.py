"""Plugin package initialiser.

Keep this file lightweight; do not import concrete plugins here so imports of
``soak.plugins`` remain side-effect free. Concrete plugin modules
(``logging``, ``pydantic``) self-register when imported (see
``soak.__init__`` for eager imports).
"""

__all__: list[str] = []
