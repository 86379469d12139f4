"""
Domain layer: entities, repository contracts, validation rules and the
exceptions use cases raise.
"""
