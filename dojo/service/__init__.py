"""Helpers for small HTTP services: environment, masking, logging, retries, requests."""