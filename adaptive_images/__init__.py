"""Adaptive images: breakpoint-based image width selection"""
