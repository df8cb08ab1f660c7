"""
Application layer.

Use cases orchestrate domain entities and talk to infrastructure only
through the protocols declared here.
"""
