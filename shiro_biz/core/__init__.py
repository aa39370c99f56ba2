"""
Core - Cấu hình runtime, hằng số và exception dùng chung.
"""
