"""Validators por canal — validação de requisições antes de chamar o adapter."""

__all__: list[str] = []
