"""MiniHub: a small catalogue of everyday calculators.

The ``calculators`` subpackage holds the pure computations and the
``components`` subpackage holds the Streamlit widgets built on top of them.
"""

__version__ = "0.1.0"
