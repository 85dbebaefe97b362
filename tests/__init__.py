"""
Test suite for Pulse Canvas.

This package contains:
- Unit tests for waveform construction, configuration, colours and the
  Pulse drawing/animation logic
- Integration tests against the real Qt surface, renderer and timer
- Mock surface, renderer and timer fixtures for testing without Qt
"""
