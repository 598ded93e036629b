"""Core de hr-manager: dominio, contratos (Protocol), casos de uso y configuración."""
