"""Platform adapters: logging and the D-Bus session bus."""
