"""Built-in budget templates.

Sample transaction amounts keep the authoring convention of negative outflows; the materializer stores
magnitudes only. Offsets are whole days relative to the day the template is applied.
"""

from budgetcore.core.models import BudgetTemplate, CategoryTemplate, CategoryType, TransactionTemplate
from budgetcore.templates.registry import TemplateRegistry


def _income(name: str, planned: float, color: str, icon: str, description: str) -> CategoryTemplate:
    return CategoryTemplate(
        name=name, type=CategoryType.INCOME, planned_amount=planned, color=color, icon=icon, description=description
    )


def _expense(name: str, planned: float, color: str, icon: str, description: str) -> CategoryTemplate:
    return CategoryTemplate(
        name=name, type=CategoryType.EXPENSE, planned_amount=planned, color=color, icon=icon, description=description
    )


def _sample(category: str, description: str, amount: float, offset: int, *, posted: bool = True) -> TransactionTemplate:
    return TransactionTemplate(
        category_name=category, description=description, amount=amount, relative_day_offset=offset, is_posted=posted
    )


PERSONAL_MONTHLY = BudgetTemplate(
    id="personal-monthly",
    name="Personal Monthly Budget",
    description="Complete personal budget with salary, utilities, and essential expenses",
    icon="👤",
    color="#3B82F6",
    categories=(
        _income("Salary", 50000, "#10B981", "💰", "Primary income from employment"),
        _income("Freelance", 15000, "#059669", "💻", "Additional income from freelance work"),
        _income("Investments", 5000, "#065F46", "📈", "Dividends and investment returns"),
        _expense("Rent/Mortgage", 20000, "#DC2626", "🏠", "Monthly housing payment"),
        _expense("Utilities", 3500, "#EA580C", "⚡", "Electricity, water, internet"),
        _expense("Groceries", 8000, "#D97706", "🛒", "Food and household items"),
        _expense("Transportation", 4000, "#7C2D12", "🚗", "Gas, public transport, maintenance"),
        _expense("Dining Out", 5000, "#BE185D", "🍽️", "Restaurants and food delivery"),
        _expense("Entertainment", 3000, "#9333EA", "🎬", "Movies, games, subscriptions"),
        _expense("Healthcare", 2500, "#DB2777", "🏥", "Medical expenses and insurance"),
        _expense("Emergency Fund", 5000, "#059669", "🛡️", "Emergency savings fund"),
        _expense("Investment Contributions", 7000, "#0D9488", "📊", "Stocks, bonds, retirement fund"),
    ),
    sample_transactions=(
        _sample("Salary", "Monthly Salary Payment", 50000, -1),
        _sample("Freelance", "Website Development Project", 8000, -3),
        _sample("Investments", "Dividend Payment - REIT", 2500, -5),
        _sample("Rent/Mortgage", "Monthly Rent Payment", -20000, -1),
        _sample("Utilities", "Electricity Bill - Meralco", -2800, -2),
        _sample("Utilities", "Internet Bill - PLDT", -1299, -3),
        _sample("Groceries", "SM Supermarket", -3200, -1),
        _sample("Groceries", "Puregold - Weekly Shopping", -2100, -4),
        _sample("Transportation", "Gas Fill-up", -2500, -2),
        _sample("Transportation", "Grab - Airport Trip", -450, -6),
        _sample("Dining Out", "Dinner at Greenbelt", -1800, -1),
        _sample("Dining Out", "Lunch Meeting", -650, -3),
        _sample("Entertainment", "Netflix Subscription", -549, -5),
        _sample("Entertainment", "Movie Night - Ayala Cinema", -800, -7),
        _sample("Healthcare", "Doctor Visit - Check-up", -1500, -10),
        _sample("Emergency Fund", "Monthly Emergency Savings", -5000, -1),
        _sample("Investment Contributions", "COL Financial - Monthly Investment", -7000, -1),
        _sample("Groceries", "Weekend Shopping", -2500, 0, posted=False),
        _sample("Transportation", "Car Maintenance", -3000, 2, posted=False),
        _sample("Freelance", "Mobile App Project - Pending", 12000, 5, posted=False),
    ),
)

STUDENT_BUDGET = BudgetTemplate(
    id="student-budget",
    name="Student Budget",
    description="Budget template for students with allowance and school expenses",
    icon="🎓",
    color="#8B5CF6",
    categories=(
        _income("Allowance", 15000, "#10B981", "💵", "Monthly allowance from parents"),
        _income("Part-time Job", 8000, "#059669", "👨‍💼", "Income from part-time work"),
        _income("Scholarship", 5000, "#065F46", "🏆", "Scholarship grants"),
        _expense("Tuition & Fees", 12000, "#DC2626", "📚", "School tuition and fees"),
        _expense("Books & Supplies", 2500, "#EA580C", "📖", "Textbooks and school supplies"),
        _expense("Food", 6000, "#D97706", "🍕", "Meals and snacks"),
        _expense("Transportation", 2000, "#7C2D12", "🚌", "Commute to school"),
        _expense("Entertainment", 3000, "#9333EA", "🎮", "Movies, games, social activities"),
        _expense("Personal Care", 1500, "#BE185D", "🧴", "Toiletries and personal items"),
        _expense("Savings", 2000, "#059669", "🐷", "Emergency fund and future expenses"),
    ),
    sample_transactions=(
        _sample("Allowance", "Weekly Allowance", 3750, -1),
        _sample("Part-time Job", "Coffee Shop - Weekly Pay", 2000, -2),
        _sample("Scholarship", "Academic Scholarship", 5000, -30),
        _sample("Tuition & Fees", "Monthly Tuition Payment", -12000, -1),
        _sample("Books & Supplies", "Programming Textbook", -1200, -5),
        _sample("Books & Supplies", "Notebooks and Pens", -350, -10),
        _sample("Food", "Cafeteria Lunch", -150, -1),
        _sample("Food", "Coffee and Snacks", -80, -1),
        _sample("Transportation", "Jeepney Fare - Week", -350, -1),
        _sample("Entertainment", "Movie with Friends", -300, -3),
        _sample("Personal Care", "Shampoo and Soap", -250, -7),
        _sample("Savings", "Monthly Savings", -2000, -1),
        _sample("Food", "Grocery Shopping", -800, 0, posted=False),
        _sample("Entertainment", "Concert Ticket", -1500, 3, posted=False),
    ),
)

FAMILY_BUDGET = BudgetTemplate(
    id="family-budget",
    name="Family Budget",
    description="Comprehensive family budget with multiple income sources and family expenses",
    icon="👨‍👩‍👧‍👦",
    color="#F59E0B",
    categories=(
        _income("Primary Income", 80000, "#10B981", "💼", "Main breadwinner salary"),
        _income("Secondary Income", 45000, "#059669", "👩‍💼", "Partner/spouse income"),
        _income("Side Business", 20000, "#065F46", "🏪", "Family business or side hustle"),
        _expense("Mortgage/Rent", 35000, "#DC2626", "🏠", "Monthly housing payment"),
        _expense("Utilities", 5500, "#EA580C", "⚡", "Electricity, water, gas, internet"),
        _expense("Groceries", 15000, "#D97706", "🛒", "Family food and household items"),
        _expense("Children Education", 25000, "#7C2D12", "🎒", "School fees, supplies, activities"),
        _expense("Healthcare", 8000, "#BE185D", "🏥", "Family medical expenses"),
        _expense("Transportation", 8000, "#7C2D12", "🚗", "Family vehicles and transport"),
        _expense("Family Activities", 10000, "#9333EA", "🎡", "Family outings and entertainment"),
        _expense("Personal Care", 4000, "#DB2777", "💅", "Haircuts, personal items"),
        _expense("Emergency Fund", 15000, "#059669", "🛡️", "Family emergency savings"),
        _expense("Children Future", 12000, "#0D9488", "🎓", "College fund for children"),
        _expense("Retirement", 18000, "#065F46", "🏖️", "Retirement savings"),
    ),
    sample_transactions=(
        _sample("Primary Income", "Salary - Main Job", 80000, -1),
        _sample("Secondary Income", "Spouse Salary", 45000, -1),
        _sample("Side Business", "Online Store Sales", 12000, -3),
        _sample("Mortgage/Rent", "Monthly Mortgage Payment", -35000, -1),
        _sample("Utilities", "Electricity Bill", -3200, -2),
        _sample("Utilities", "Water Bill", -800, -3),
        _sample("Groceries", "Weekly Grocery Shopping", -4500, -1),
        _sample("Children Education", "School Tuition - 2 Kids", -20000, -1),
        _sample("Children Education", "School Supplies", -2200, -5),
        _sample("Healthcare", "Family Doctor Visit", -2500, -7),
        _sample("Transportation", "Gas and Car Maintenance", -3500, -2),
        _sample("Family Activities", "Weekend at the Park", -1200, -2),
        _sample("Family Activities", "Movie Night for 4", -1600, -5),
        _sample("Personal Care", "Family Haircuts", -1500, -10),
        _sample("Emergency Fund", "Monthly Emergency Savings", -15000, -1),
        _sample("Children Future", "College Fund Contribution", -12000, -1),
        _sample("Retirement", "Retirement Fund Contribution", -18000, -1),
        _sample("Groceries", "Mid-week Grocery Run", -2500, 0, posted=False),
        _sample("Side Business", "Pending Order Payment", 8000, 2, posted=False),
    ),
)

BUSINESS_BUDGET = BudgetTemplate(
    id="business-budget",
    name="Small Business Budget",
    description="Monthly budget for small business operations and expenses",
    icon="🏢",
    color="#059669",
    categories=(
        _income("Product Sales", 150000, "#10B981", "💰", "Revenue from product sales"),
        _income("Service Revenue", 80000, "#059669", "🔧", "Income from services"),
        _income("Consulting", 40000, "#065F46", "💡", "Consulting and advisory fees"),
        _expense("Office Rent", 25000, "#DC2626", "🏢", "Monthly office lease"),
        _expense("Utilities", 4000, "#EA580C", "⚡", "Electricity, internet, phone"),
        _expense("Staff Salaries", 120000, "#7C2D12", "👥", "Employee compensation"),
        _expense("Marketing", 15000, "#9333EA", "📢", "Advertising and promotion"),
        _expense("Supplies", 8000, "#D97706", "📦", "Office and operational supplies"),
        _expense("Equipment", 10000, "#BE185D", "💻", "Equipment and technology"),
        _expense("Professional Services", 12000, "#DB2777", "⚖️", "Legal, accounting, consulting"),
        _expense("Business Savings", 20000, "#059669", "🏦", "Business emergency fund"),
    ),
    sample_transactions=(
        _sample("Product Sales", "Monthly Product Sales", 150000, -1),
        _sample("Service Revenue", "Maintenance Contracts", 80000, -2),
        _sample("Consulting", "Strategy Consulting Project", 25000, -5),
        _sample("Office Rent", "Monthly Office Lease", -25000, -1),
        _sample("Utilities", "Office Electricity", -2500, -2),
        _sample("Staff Salaries", "Monthly Payroll", -120000, -1),
        _sample("Marketing", "Facebook Ads Campaign", -5000, -3),
        _sample("Marketing", "Google Ads", -3500, -5),
        _sample("Supplies", "Office Supplies", -2800, -7),
        _sample("Equipment", "New Laptop for Staff", -45000, -10),
        _sample("Professional Services", "Monthly Accounting Fee", -8000, -1),
        _sample("Business Savings", "Monthly Business Savings", -20000, -1),
        _sample("Consulting", "Pending Project Payment", 15000, 3, posted=False),
        _sample("Supplies", "Order Processing", -1500, 1, posted=False),
    ),
)

BUDGET_TEMPLATES: tuple[BudgetTemplate, ...] = (PERSONAL_MONTHLY, STUDENT_BUDGET, FAMILY_BUDGET, BUSINESS_BUDGET)

for _template in BUDGET_TEMPLATES:
    TemplateRegistry.register(_template)
