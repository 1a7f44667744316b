"""
Test catalog request/response models
"""

from typing import List, Optional

from pydantic import Field

from pathlab.schemas.common import RequestModel, RequiredStr, ResponseModel


class LabTestIn(RequestModel):
    """Test create/update payload"""
    test_name: RequiredStr
    test_rate: float = Field(..., gt=0)
    report_heading: Optional[str] = None
    test_code: Optional[str] = None
    method: Optional[str] = None
    comments: Optional[str] = None
    category_id: int


class LabTestSummary(ResponseModel):
    test_id: int
    test_name: str
    test_rate: float
    test_code: Optional[str] = None
    method: Optional[str] = None
    default_component_id: Optional[int] = None


class LabTestOut(LabTestSummary):
    report_heading: Optional[str] = None
    comments: Optional[str] = None
    category_id: int


class LabTestListResponse(ResponseModel):
    success: bool = True
    tests: List[LabTestSummary]


class LabTestResponse(ResponseModel):
    success: bool = True
    test: LabTestOut


class LabTestCreatedResponse(ResponseModel):
    success: bool = True
    message: str
    testId: int


class CategoryIn(RequestModel):
    category_name: RequiredStr


class CategoryOption(ResponseModel):
    """Category as a picker option"""
    label: str
    value: int


class CategoryListResponse(ResponseModel):
    success: bool = True
    categories: List[CategoryOption]


class CategoryCreatedResponse(ResponseModel):
    success: bool = True
    message: str
    categoryId: int


class ComponentIn(RequestModel):
    test_id: int
    component_name: RequiredStr
    sub_test_name: Optional[str] = None
    specimen: Optional[str] = None
    test_unit: Optional[str] = None
    reference_range: Optional[str] = None


class ComponentOut(ResponseModel):
    component_id: int
    component_name: str
    sub_test_name: Optional[str] = None


class ComponentListResponse(ResponseModel):
    success: bool = True
    components: List[ComponentOut]


class ComponentCreatedResponse(ResponseModel):
    success: bool = True
    message: str
    componentId: int
