"""Configuration, logging, errors and store access shared by the app."""
