"""
hotel_app - 酒店预订应用层
配置、门面、HTTP API、交互式菜单与测试数据
"""
