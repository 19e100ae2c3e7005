"""
Test suite for PyFastResize package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for kernels, convolution, resizing and sharpening
- Integration tests for file based workflows
- Taichi backend parity tests

Run with: pytest
"""
