"""eosintf command-line interface."""
