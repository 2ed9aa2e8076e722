"""
Конфигурация Django-проекта officials_management.
"""
