"""Application state and the ports the session loop depends on."""
