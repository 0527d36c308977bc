"""Core listing and rendering pipeline for brew-recents."""
