"""Host operating system probes."""
