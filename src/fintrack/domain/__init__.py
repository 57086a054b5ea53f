"""Domain layer for fintrack application.

Services live in their own modules (``fintrack.domain.account`` and so on);
nothing is imported here so that the database layer can depend on
``fintrack.domain.entities`` without pulling the services in.
"""
