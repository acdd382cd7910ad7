"""Built-in bilingual rejection rules for Saudi health insurance claims."""

from .schemas.common import RejectionCategory, RuleSeverity
from .schemas.rule import RejectionRule

DEFAULT_REJECTION_RULES: list[RejectionRule] = [
    # Medical
    RejectionRule(
        id="rule-prior-auth-001",
        name="Prior Authorization Required",
        name_ar="موافقة مسبقة مطلوبة",
        description="Claims rejected due to missing or invalid prior authorization for procedures requiring pre-approval",
        category=RejectionCategory.MEDICAL,
        subcategory="Prior Authorization",
        subcategory_ar="الموافقة المسبقة",
        keywords=[
            "prior authorization",
            "pre-approval",
            "authorization required",
            "approval needed",
            "unauthorized procedure",
            "pre-auth",
            "approval missing",
        ],
        keywords_ar=[
            "موافقة مسبقة",
            "تصريح مسبق",
            "موافقة مطلوبة",
            "عدم وجود موافقة",
            "إجراء غير مصرح",
            "تفويض مسبق",
        ],
        codes=["AUTH001", "PA001", "PREAUTH", "AUTH_REQ"],
        severity=RuleSeverity.HIGH,
        auto_fix=True,
        fix_suggestion="Ensure all procedures requiring prior authorization are approved before treatment. Implement automated prior authorization checking in your system.",
    ),
    RejectionRule(
        id="rule-medical-necessity-001",
        name="Medical Necessity Not Met",
        name_ar="عدم استيفاء الضرورة الطبية",
        description="Claims rejected because the treatment or procedure is not deemed medically necessary",
        category=RejectionCategory.MEDICAL,
        subcategory="Medical Necessity",
        subcategory_ar="الضرورة الطبية",
        keywords=[
            "medical necessity",
            "not medically necessary",
            "unnecessary treatment",
            "inappropriate procedure",
            "clinical criteria not met",
            "not indicated",
        ],
        keywords_ar=[
            "الضرورة الطبية",
            "غير ضروري طبياً",
            "علاج غير مبرر",
            "إجراء غير مناسب",
            "معايير سريرية غير مستوفاة",
        ],
        codes=["MED001", "NECESSITY", "NOT_MED_NEC", "CLINICAL_CRITERIA"],
        severity=RuleSeverity.MEDIUM,
        auto_fix=False,
        fix_suggestion="Review clinical documentation and ensure treatments align with established medical guidelines. Provide additional clinical justification when submitting claims.",
    ),
    RejectionRule(
        id="rule-diagnosis-mismatch-001",
        name="Diagnosis Code Mismatch",
        name_ar="عدم تطابق رمز التشخيص",
        description="Claims rejected due to inconsistency between diagnosis codes and procedures performed",
        category=RejectionCategory.MEDICAL,
        subcategory="Diagnosis Coding",
        subcategory_ar="ترميز التشخيص",
        keywords=[
            "diagnosis mismatch",
            "inconsistent diagnosis",
            "wrong diagnosis code",
            "diagnosis procedure mismatch",
            "ICD code error",
            "coding error",
        ],
        keywords_ar=[
            "عدم تطابق التشخيص",
            "تشخيص غير متسق",
            "رمز تشخيص خاطئ",
            "عدم تطابق التشخيص والإجراء",
            "خطأ في رمز التصنيف الدولي",
        ],
        codes=["ICD001", "DIAG_MISMATCH", "DX_ERROR", "CODING_ERROR"],
        severity=RuleSeverity.MEDIUM,
        auto_fix=True,
        fix_suggestion="Verify diagnosis codes match the documented conditions and procedures. Train coding staff on proper ICD-10 usage and implement coding validation tools.",
    ),
    # Technical
    RejectionRule(
        id="rule-missing-docs-001",
        name="Missing Required Documentation",
        name_ar="وثائق مطلوبة مفقودة",
        description="Claims rejected due to missing required supporting documentation or attachments",
        category=RejectionCategory.TECHNICAL,
        subcategory="Documentation",
        subcategory_ar="التوثيق",
        keywords=[
            "missing documentation",
            "incomplete documentation",
            "required documents missing",
            "attachments missing",
            "supporting documents",
            "documentation incomplete",
        ],
        keywords_ar=[
            "وثائق مفقودة",
            "توثيق غير مكتمل",
            "مستندات مطلوبة مفقودة",
            "مرفقات مفقودة",
            "مستندات داعمة",
            "توثيق ناقص",
        ],
        codes=["DOC001", "MISSING_DOCS", "INCOMPLETE_DOC", "ATTACH_MISSING"],
        severity=RuleSeverity.HIGH,
        auto_fix=True,
        fix_suggestion="Implement a documentation checklist and ensure all required documents are attached before claim submission. Use electronic document management systems.",
    ),
    RejectionRule(
        id="rule-billing-code-error-001",
        name="Invalid Billing Code",
        name_ar="رمز فوترة غير صحيح",
        description="Claims rejected due to incorrect, invalid, or outdated billing procedure codes",
        category=RejectionCategory.TECHNICAL,
        subcategory="Billing Codes",
        subcategory_ar="رموز الفوترة",
        keywords=[
            "invalid code",
            "wrong billing code",
            "incorrect procedure code",
            "code not found",
            "obsolete code",
            "billing error",
            "procedure code error",
        ],
        keywords_ar=[
            "رمز غير صحيح",
            "رمز فوترة خاطئ",
            "رمز إجراء غير صحيح",
            "الرمز غير موجود",
            "رمز قديم",
            "خطأ في الفوترة",
        ],
        codes=["BILL001", "INVALID_CODE", "PROC_CODE_ERROR", "CODE_NOT_FOUND"],
        severity=RuleSeverity.MEDIUM,
        auto_fix=True,
        fix_suggestion="Update billing code databases regularly and implement real-time code validation. Train billing staff on current procedure codes and coding guidelines.",
    ),
    RejectionRule(
        id="rule-data-entry-error-001",
        name="Data Entry Error",
        name_ar="خطأ في إدخال البيانات",
        description="Claims rejected due to errors in patient information, dates, or other data fields",
        category=RejectionCategory.TECHNICAL,
        subcategory="Data Entry",
        subcategory_ar="إدخال البيانات",
        keywords=[
            "data entry error",
            "incorrect information",
            "wrong patient details",
            "date error",
            "typing error",
            "information mismatch",
            "field error",
        ],
        keywords_ar=[
            "خطأ في إدخال البيانات",
            "معلومات غير صحيحة",
            "تفاصيل مريض خاطئة",
            "خطأ في التاريخ",
            "خطأ في الطباعة",
            "عدم تطابق المعلومات",
        ],
        codes=["DATA001", "ENTRY_ERROR", "INFO_ERROR", "FIELD_ERROR"],
        severity=RuleSeverity.LOW,
        auto_fix=True,
        fix_suggestion="Implement data validation controls and double-entry verification. Train staff on accurate data entry and use automated data capture where possible.",
    ),
    RejectionRule(
        id="rule-system-timeout-001",
        name="System Timeout/Integration Error",
        name_ar="خطأ في انتهاء وقت النظام/التكامل",
        description="Claims rejected due to system timeouts, integration failures, or technical connectivity issues",
        category=RejectionCategory.TECHNICAL,
        subcategory="System Integration",
        subcategory_ar="تكامل النظام",
        keywords=[
            "system timeout",
            "integration error",
            "connectivity issue",
            "technical failure",
            "system error",
            "connection timeout",
            "network error",
        ],
        keywords_ar=[
            "انتهاء وقت النظام",
            "خطأ في التكامل",
            "مشكلة في الاتصال",
            "فشل تقني",
            "خطأ في النظام",
            "انتهاء وقت الاتصال",
        ],
        codes=["SYS001", "TIMEOUT", "INTEGRATION_ERROR", "CONN_ERROR"],
        severity=RuleSeverity.CRITICAL,
        auto_fix=False,
        fix_suggestion="Work with IT team to improve system reliability and implement retry mechanisms. Monitor system performance and upgrade infrastructure as needed.",
    ),
    # Regulatory
    RejectionRule(
        id="rule-cchi-compliance-001",
        name="CCHI Compliance Violation",
        name_ar="مخالفة امتثال مجلس الضمان الصحي",
        description="Claims rejected for non-compliance with Council of Cooperative Health Insurance (CCHI) regulations",
        category=RejectionCategory.MEDICAL,
        subcategory="Regulatory Compliance",
        subcategory_ar="الامتثال التنظيمي",
        keywords=[
            "CCHI",
            "regulatory compliance",
            "council regulation",
            "compliance violation",
            "health insurance council",
            "saudi regulation",
            "MOH guidelines",
        ],
        keywords_ar=[
            "مجلس الضمان الصحي",
            "الامتثال التنظيمي",
            "لوائح المجلس",
            "مخالفة الامتثال",
            "مجلس التأمين الصحي",
            "اللوائح السعودية",
            "إرشادات وزارة الصحة",
        ],
        codes=["CCHI001", "REG_COMPLIANCE", "MOH001", "SAUDI_REG"],
        severity=RuleSeverity.CRITICAL,
        auto_fix=False,
        fix_suggestion="Review and update procedures to ensure full compliance with CCHI regulations. Regularly train staff on Saudi healthcare insurance requirements.",
    ),
    RejectionRule(
        id="rule-essential-benefits-001",
        name="Essential Benefits Package Violation",
        name_ar="مخالفة حزمة المنافع الأساسية",
        description="Claims rejected because the service is not covered under the Essential Benefits Package (EBP)",
        category=RejectionCategory.MEDICAL,
        subcategory="Coverage Limitation",
        subcategory_ar="قيود التغطية",
        keywords=[
            "essential benefits",
            "EBP",
            "not covered",
            "coverage limitation",
            "benefit package",
            "excluded service",
            "benefit restriction",
        ],
        keywords_ar=[
            "المنافع الأساسية",
            "حزمة المنافع",
            "غير مشمول",
            "قيود التغطية",
            "خدمة مستثناة",
            "قيود المنفعة",
            "تحديد التغطية",
        ],
        codes=["EBP001", "NOT_COVERED", "BENEFIT_LIMIT", "EXCLUDED"],
        severity=RuleSeverity.MEDIUM,
        auto_fix=False,
        fix_suggestion="Verify service coverage against the current Essential Benefits Package before providing treatment. Inform patients of any potential out-of-pocket costs.",
    ),
]
