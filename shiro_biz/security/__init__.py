"""
Module bảo mật - Các điểm mở rộng xác thực cho tầng bảo mật kiểu Shiro.
"""
