from simdata.api.jobs import EventsOutput, SeriesOutput, fetch_prices, format_apr, format_events

__all__ = ["EventsOutput", "SeriesOutput", "fetch_prices", "format_apr", "format_events"]
