"""Núcleo do domínio: entidades, exceções e serviços."""
