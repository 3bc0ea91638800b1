"""MiniHub - a tiny repository browser backed by a JSON document"""
