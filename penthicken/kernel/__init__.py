"""Messaging and settings infrastructure shared by the thickening tools."""

from .channel import *
from .settings import *
