"""
Application controller for the yt-dlp menu front-end.
"""
