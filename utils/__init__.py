"""輔助工具模塊"""
