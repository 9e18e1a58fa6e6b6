"""Enumeration types for the housing market."""

from enum import Enum


class HousingType(str, Enum):
    DETACHED = "DETACHED"
    SEMI_DETACHED = "SEMI_DETACHED"
    TERRACED = "TERRACED"
    BUNGALOW = "BUNGALOW"
