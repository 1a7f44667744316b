"""Request and response models for the PathLab API"""
