"""Marketplace listing service"""
