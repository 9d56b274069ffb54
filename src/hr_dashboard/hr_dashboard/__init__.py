"""HR Dashboard package.

Feature modules (attendance, bradford, teams, users, reports) follow the same
layering: plain domain models, repository protocols with in-memory
implementations, services holding the business rules, and a thin Flask JSON
controller per feature.
"""
