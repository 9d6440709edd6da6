"""Corner point grid inspection library.

.. autosummary::
    :toctree: _autosummary
    :caption: API Reference
    :template: custom-module-template.rst
    :recursive:

    grid_source
    inspector
    olio
"""

import logging

__version__ = "0.1.0"
log = logging.getLogger(__name__)
log.info(f"Imported cpinspect version {__version__}")
