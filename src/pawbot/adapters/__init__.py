"""Adaptadores para serviços externos (APIs HTTP e arquivos locais)."""
