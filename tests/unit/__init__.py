"""
Unit tests for Auto Retry.

Test individual components in isolation:
- Retry engine (transport, rate-limit and server-error handling)
- Delay clock, outcome classification, policy, error reporting
- Transports (transformer pipeline, httpx client)
- Logging configuration and application wiring
"""
