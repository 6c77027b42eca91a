"""Command-line client for the Tibber electricity API."""

APP_NAME = "powerctl"
