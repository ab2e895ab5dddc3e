"""Configuration mapping and levelled logging."""