"""Ядро пакета: настройки, логирование, исключения и фабрики."""
