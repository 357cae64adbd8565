"""API - camada de borda HTTP.

Responsabilidades:
- Receber requests do frontend
- Validar formato do body
- Traduzir resultados dos serviços em respostas HTTP

NÃO PODE conter: chamadas à LLM, regras de serialização vCard, política de alertas.
"""
