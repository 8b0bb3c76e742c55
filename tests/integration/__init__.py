"""
Integration tests for Auto Retry.

Test components together against a scripted Bot API (httpx.MockTransport):
- Full pipeline (BotApiClient + AutoRetry installed via ``use``)
- Settings-driven wiring
- Cancellation while waiting between retries
"""
