"""HTTP API for the CV Optimizer."""
