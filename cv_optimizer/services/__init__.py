"""Service layer for the CV Optimizer."""
