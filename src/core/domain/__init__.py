"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el empleado, su invariante y la vista de resultado (Pydantic v2).
- El dominio no conoce almacenamiento, CLI ni logging: solo conceptos de RR.HH.
"""
