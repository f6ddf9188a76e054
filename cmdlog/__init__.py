"""HTTP API for recording executed commands and their messages."""
