"""Multi-tier in-memory cache with weighted eviction, access prediction and adaptive sizing."""