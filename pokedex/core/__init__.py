"""Pokedex Core - 순수 Python, 저장소/화면 무관"""
