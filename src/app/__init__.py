"""App — coração do sistema: orquestração, casos de uso e sessão.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- protocols/: contratos/interfaces e modelos compartilhados
- sessions/: ciclo de vida da sessão WhatsApp Web e pareamento por QR
- observability/: correlation_id e métricas via logs estruturados
- constants/: enums e textos fixos das respostas

Padrão: app executa; api adapta; config configura; utils apoia.
"""
