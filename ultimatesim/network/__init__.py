"""TCP/UDP server endpoints and positional delta payloads."""