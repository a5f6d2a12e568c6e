"""Backend Dev Job Scout: fetch, filter and favorite job postings from an AI search agent."""
