"""HRM 细胞：JSON 文件存储的人力资源 Mock REST 服务与客户端数据访问层。"""

__version__ = "1.0.0"
