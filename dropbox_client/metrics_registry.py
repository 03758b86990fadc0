from prometheus_client import Counter

dropbox_requests_total = Counter(
    "dropbox_requests_total", "Total number of Dropbox API calls", ["endpoint"]
)
dropbox_request_errors_total = Counter(
    "dropbox_request_errors_total", "Total failed Dropbox API calls", ["endpoint", "kind"]
)
