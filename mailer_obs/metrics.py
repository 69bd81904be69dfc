"""
Prometheus Metrics Registration.

Counters and histograms for the MCP tool layer.
"""

from prometheus_client import Counter, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

tool_calls_total = Counter(
    "tool_calls_total",
    "Total tool calls",
    ["tool_name", "status"],  # success, failure
)

tool_call_errors_total = Counter(
    "tool_call_errors_total",
    "Failed tool requests by protocol error category",
    ["category"],  # INVALID_REQUEST, METHOD_NOT_FOUND, INTERNAL_ERROR
)

list_tools_total = Counter(
    "list_tools_total", "Total list-tools requests", ["status"]
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

tool_call_duration = Histogram(
    "tool_call_duration_seconds",
    "Tool call duration, including the SendGrid round trip",
    ["tool_name"],
    buckets=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0),
)
