"""
NPV Sweep Backend Package

FastAPI-based backend for net present value analysis.
Provides REST API endpoints for single-rate NPV calculation and
discount-rate sweeps.
"""
