"""Composition root for wiring dependencies.

This package is the only place that pairs application services with
concrete infrastructure (stubs, clock, metrics).
"""
