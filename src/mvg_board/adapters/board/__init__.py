"""Board adapters: shared state, tickers, formatting and display."""
