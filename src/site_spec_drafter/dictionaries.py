from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

SUPPORTED_SITE_TYPES: Sequence[str] = (
    "business",
    "booking",
    "ecommerce",
    "portfolio",
    "blog",
    "personal",
    "educational",
    "nonprofit",
    "event",
    "landing",
)

DEFAULT_KEY = "business"
DEFAULT_TAGLINE = "Building something remarkable together"


def resolution_order(*keys: str | None) -> tuple[str, ...]:
    """Ordered, de-duplicated lookup keys with blanks removed.

    ``resolution_order("restaurant", "booking", "business")`` is the chain every
    sub-type-aware table walks: most specific first, terminal fallback last.
    """
    ordered: list[str] = []
    for key in keys:
        if key and key not in ordered:
            ordered.append(key)
    return tuple(ordered)


def _resolve(table: Mapping[str, Any], *keys: str | None, default: Any = None) -> Any:
    for key in resolution_order(*keys):
        if key in table:
            return table[key]
    return default


@dataclass(frozen=True)
class IndustryContent:
    taglines: Mapping[str, str]
    headline_template: str
    features: Sequence[Mapping[str, str]]
    testimonials: Sequence[Mapping[str, Any]]
    about_template: str

    def headline(self, name: str) -> str:
        return self.headline_template.format(name=name)

    def about_body(self, name: str, description: str = "") -> str:
        return self.about_template.format(name=name, description=description)


DEFAULT_INDUSTRY_CONTENT: Mapping[str, IndustryContent] = {
    "business": IndustryContent(
        taglines={
            "contact": "Professional solutions tailored to your needs",
            "book": "Book your consultation today",
            "showcase": "Excellence in every detail",
            "sell": "Quality products and services you can trust",
        },
        headline_template="{name} — Where Results Meet Excellence",
        features=(
            {
                "icon": "Target",
                "title": "Strategic Approach",
                "description": "We start with your goals and work backwards to create a tailored strategy that delivers measurable results.",
            },
            {
                "icon": "Zap",
                "title": "Fast Delivery",
                "description": "Quick turnaround without compromising on quality or attention to detail.",
            },
            {
                "icon": "Shield",
                "title": "Proven Results",
                "description": "Track record of delivering measurable outcomes for our clients across every project.",
            },
            {
                "icon": "HeadphonesIcon",
                "title": "Dedicated Support",
                "description": "Responsive, personalized support from real people whenever you need it.",
            },
        ),
        testimonials=(
            {
                "quote": "They transformed our online presence completely. We saw a 40% increase in inquiries within the first month — couldn't believe the difference.",
                "name": "Sarah Chen",
                "role": "CEO, TechVenture",
                "rating": 5,
            },
            {
                "quote": "Professional, responsive, and incredibly talented. They understood our vision immediately and delivered beyond what we expected.",
                "name": "Marcus Johnson",
                "role": "Founder, GreenLeaf Co",
                "rating": 5,
            },
            {
                "quote": "Working with them was a game-changer. Our conversion rates doubled and the design still feels fresh a year later.",
                "name": "Elena Rodriguez",
                "role": "Director, Bright Ideas Agency",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} is committed to delivering exceptional results that exceed "
            "expectations. Our approach combines deep industry expertise with a genuine understanding "
            "of what our clients need to succeed.</p>"
        ),
    ),
    "portfolio": IndustryContent(
        taglines={
            "hire": "Creative work that speaks for itself",
            "attention": "Pushing boundaries, creating impact",
            "audience": "Stories worth sharing",
            "sell": "Unique creations, exceptional quality",
        },
        headline_template="{name} — Creative Work That Moves People",
        features=(
            {
                "icon": "Palette",
                "title": "Creative Direction",
                "description": "Thoughtful design choices that elevate every project and leave a lasting impression.",
            },
            {
                "icon": "Eye",
                "title": "Attention to Detail",
                "description": "Every pixel considered, every element purposeful — nothing is accidental.",
            },
            {
                "icon": "Lightbulb",
                "title": "Fresh Perspectives",
                "description": "Innovative approaches that stand out from the crowd and capture attention.",
            },
            {
                "icon": "Award",
                "title": "Award-Winning",
                "description": "Recognized for excellence in design, execution, and creative innovation.",
            },
        ),
        testimonials=(
            {
                "quote": "An exceptional creative talent. Their work elevated our entire brand identity and every marketing touchpoint.",
                "name": "David Park",
                "role": "Creative Director, Nova Studio",
                "rating": 5,
            },
            {
                "quote": "Stunning work with incredible attention to detail. Every project exceeded what we thought was possible.",
                "name": "Amara Williams",
                "role": "Marketing Lead, Pulse Agency",
                "rating": 5,
            },
            {
                "quote": "True artistry combined with professional reliability. A rare combination in the creative world.",
                "name": "James Mitchell",
                "role": "CEO, Vanguard Media",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} brings a distinctive creative vision to every project — blending "
            "artistic craft with strategic thinking to produce work that resonates.</p>"
        ),
    ),
    "ecommerce": IndustryContent(
        taglines={
            "products": "Shop our curated collection",
            "digital": "Digital products that deliver real value",
            "subscriptions": "Subscribe to something special",
            "marketplace": "Your one-stop marketplace",
        },
        headline_template="{name} — Discover Something You'll Love",
        features=(
            {
                "icon": "Package",
                "title": "Quality Products",
                "description": "Carefully curated selection of premium products that meet our exacting standards.",
            },
            {
                "icon": "Truck",
                "title": "Fast Shipping",
                "description": "Quick and reliable delivery to your doorstep, with tracking every step of the way.",
            },
            {
                "icon": "RotateCcw",
                "title": "Easy Returns",
                "description": "Hassle-free returns within 30 days. No questions asked, no hoops to jump through.",
            },
            {
                "icon": "ShieldCheck",
                "title": "Secure Checkout",
                "description": "Your data is protected with industry-standard encryption and secure payment processing.",
            },
        ),
        testimonials=(
            {
                "quote": "The quality exceeded my expectations. Packaging was beautiful and delivery was faster than promised. Already ordered again.",
                "name": "Rachel Kim",
                "role": "Verified Buyer",
                "rating": 5,
            },
            {
                "quote": "Best online shopping experience I've had. The product descriptions were accurate and customer service was incredibly helpful.",
                "name": "Tom Bradley",
                "role": "Repeat Customer",
                "rating": 5,
            },
            {
                "quote": "Found exactly what I was looking for. The curated selection made it easy to choose — no endless scrolling through junk.",
                "name": "Maya Patel",
                "role": "Verified Buyer",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} is dedicated to bringing you products that combine quality, value, "
            "and style. Every item in our collection is hand-selected to meet our exacting standards.</p>"
        ),
    ),
    "booking": IndustryContent(
        taglines={
            "contact": "Your appointment is a click away",
            "book": "Book your next appointment in seconds",
            "showcase": "Premium services, effortless booking",
            "sell": "Transform your experience today",
        },
        headline_template="{name} — Book Your Experience Today",
        features=(
            {
                "icon": "Calendar",
                "title": "Easy Online Scheduling",
                "description": "Book your preferred time slot in seconds. No phone calls, no waiting on hold.",
            },
            {
                "icon": "Star",
                "title": "Premium Service",
                "description": "Every visit is tailored to your preferences by experienced professionals who care.",
            },
            {
                "icon": "Clock",
                "title": "Flexible Hours",
                "description": "Early morning, evening, and weekend appointments available to fit your schedule.",
            },
            {
                "icon": "Heart",
                "title": "Client Satisfaction",
                "description": "Thousands of happy clients trust us with their regular appointments and special occasions.",
            },
        ),
        testimonials=(
            {
                "quote": "The online booking is so convenient — I can see exactly what's available and pick a time that works. No more phone tag.",
                "name": "Jessica Tran",
                "role": "Regular Client",
                "rating": 5,
            },
            {
                "quote": "Best experience I've had. The staff remembers my preferences and the results are always exactly what I wanted.",
                "name": "Andre Foster",
                "role": "Monthly Client",
                "rating": 5,
            },
            {
                "quote": "I've been coming here for two years and have never been disappointed. The consistency and attention to detail is unmatched.",
                "name": "Lauren McBride",
                "role": "Loyal Customer",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>At {name}, we believe great service starts with a great experience. From "
            "easy online booking to personalized attention during every visit, we're dedicated to exceeding "
            "your expectations.</p>"
        ),
    ),
    "blog": IndustryContent(
        taglines={
            "contact": "Stories, insights, and ideas worth reading",
            "inform": "Perspectives that make you think",
            "convert": "Join a community of curious minds",
            "sell": "Knowledge that empowers",
        },
        headline_template="{name} — Fresh Perspectives, Bold Ideas",
        features=(
            {
                "icon": "BookOpen",
                "title": "In-Depth Articles",
                "description": "Well-researched, thoughtfully written pieces that go beyond the surface.",
            },
            {
                "icon": "TrendingUp",
                "title": "Trending Topics",
                "description": "Stay ahead with coverage of the latest developments and emerging trends.",
            },
            {
                "icon": "MessageCircle",
                "title": "Active Community",
                "description": "Join conversations with readers who share your curiosity and passion.",
            },
            {
                "icon": "Mail",
                "title": "Newsletter",
                "description": "Get our best content delivered straight to your inbox — no spam, just substance.",
            },
        ),
        testimonials=(
            {
                "quote": "One of the few blogs I actually look forward to reading. The writing is sharp, the insights are original, and every post teaches me something new.",
                "name": "Chris Nakamura",
                "role": "Subscriber",
                "rating": 5,
            },
            {
                "quote": "Finally a blog that respects its readers' time. Every article is well-researched and gets straight to the point.",
                "name": "Priya Sharma",
                "role": "Regular Reader",
                "rating": 5,
            },
            {
                "quote": "I've shared more articles from this blog than any other. The content is genuinely useful and always well-written.",
                "name": "Daniel Okafor",
                "role": "Newsletter Subscriber",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} is a space for thoughtful exploration and honest perspectives. We "
            "write about the things that matter — with depth, clarity, and a commitment to substance over "
            "clickbait.</p>"
        ),
    ),
    "personal": IndustryContent(
        taglines={
            "contact": "Let's connect and create something great",
            "inform": "My journey, my perspective",
            "hire": "Available for projects and collaborations",
            "convert": "Join me on this journey",
        },
        headline_template="Hi, I'm {name}",
        features=(
            {
                "icon": "Briefcase",
                "title": "Experience",
                "description": "Years of hands-on experience across diverse projects and challenges.",
            },
            {
                "icon": "Lightbulb",
                "title": "Creative Problem Solving",
                "description": "Turning complex challenges into elegant, effective solutions.",
            },
            {
                "icon": "Users",
                "title": "Collaboration",
                "description": "Working closely with teams and clients to achieve exceptional results together.",
            },
            {
                "icon": "TrendingUp",
                "title": "Continuous Growth",
                "description": "Always learning, always improving — staying sharp in a fast-moving field.",
            },
        ),
        testimonials=(
            {
                "quote": "Incredibly talented and a pleasure to work with. They brought fresh ideas to the table and delivered on every promise.",
                "name": "Morgan Ellis",
                "role": "Project Collaborator",
                "rating": 5,
            },
            {
                "quote": "Professional, creative, and reliable. Exactly the kind of person you want on your team or leading your project.",
                "name": "Sam Whitfield",
                "role": "Former Client",
                "rating": 5,
            },
            {
                "quote": "Exceeded our expectations in every way. Their work ethic and attention to quality set them apart.",
                "name": "Nina Vasquez",
                "role": "Team Lead, Apex Digital",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} brings passion and precision to every project. Whether "
            "collaborating with teams or working independently, the focus is always on delivering work "
            "that makes a real impact.</p>"
        ),
    ),
    "educational": IndustryContent(
        taglines={
            "contact": "Learn from the best, at your own pace",
            "inform": "Knowledge that transforms",
            "convert": "Start your learning journey today",
            "sell": "Invest in your future",
        },
        headline_template="{name} — Learn Skills That Matter",
        features=(
            {
                "icon": "GraduationCap",
                "title": "Expert-Led Content",
                "description": "Courses and materials designed by industry professionals with real-world experience.",
            },
            {
                "icon": "BookOpen",
                "title": "Structured Curriculum",
                "description": "Clear learning paths that take you from beginner to proficient, step by step.",
            },
            {
                "icon": "Users",
                "title": "Community Support",
                "description": "Learn alongside peers, ask questions, and get feedback from instructors.",
            },
            {
                "icon": "Award",
                "title": "Recognized Credentials",
                "description": "Earn certificates and credentials that demonstrate your expertise to employers.",
            },
        ),
        testimonials=(
            {
                "quote": "The course structure is excellent — clear, practical, and immediately applicable to my work. Best educational investment I've made.",
                "name": "Kevin Park",
                "role": "Career Changer",
                "rating": 5,
            },
            {
                "quote": "The instructors genuinely care about student success. I got personalized feedback that accelerated my learning dramatically.",
                "name": "Lisa Johannsen",
                "role": "Graduate",
                "rating": 5,
            },
            {
                "quote": "Went from complete beginner to landing a job in my new field. The curriculum is that good.",
                "name": "Raj Mehta",
                "role": "Alumni",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} is dedicated to making high-quality education accessible and "
            "practical. Our programs are designed to equip you with skills that translate directly to "
            "real-world success.</p>"
        ),
    ),
    "nonprofit": IndustryContent(
        taglines={
            "contact": "Join us in making a difference",
            "inform": "See the impact we're making together",
            "convert": "Every contribution counts",
            "sell": "Support a cause that matters",
        },
        headline_template="{name} — Together, We Make a Difference",
        features=(
            {
                "icon": "Heart",
                "title": "Impact Tracking",
                "description": "See exactly how every dollar and volunteer hour translates into real-world change.",
            },
            {
                "icon": "Users",
                "title": "Volunteer Management",
                "description": "Easy sign-up and coordination for volunteers who want to make a hands-on difference.",
            },
            {
                "icon": "CreditCard",
                "title": "Donation Processing",
                "description": "Secure one-time and recurring donations that go directly toward our mission.",
            },
            {
                "icon": "Globe",
                "title": "Community Outreach",
                "description": "Programs and events that bring people together and amplify our collective impact.",
            },
        ),
        testimonials=(
            {
                "quote": "Volunteering here has been one of the most rewarding experiences of my life. The organization is transparent, effective, and genuinely passionate.",
                "name": "Angela Torres",
                "role": "Volunteer Coordinator",
                "rating": 5,
            },
            {
                "quote": "I've donated to many nonprofits over the years, but few show the tangible results and transparency that this organization does.",
                "name": "Robert Chen",
                "role": "Monthly Donor",
                "rating": 5,
            },
            {
                "quote": "They turned our small community grant into a program that now serves hundreds of families. Incredible impact with limited resources.",
                "name": "Patricia Owens",
                "role": "Community Partner",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} believes in the power of collective action. Every donation, every "
            "volunteer hour, and every shared story brings us closer to a world where our mission is "
            "realized.</p>"
        ),
    ),
    "event": IndustryContent(
        taglines={
            "contact": "Don't miss out — secure your spot",
            "inform": "Everything you need to know about the event",
            "convert": "Register now before spots fill up",
            "sell": "Get your tickets today",
        },
        headline_template="{name} — An Experience You Won't Forget",
        features=(
            {
                "icon": "Calendar",
                "title": "Event Schedule",
                "description": "Full agenda with speakers, sessions, and activities so you can plan your experience.",
            },
            {
                "icon": "MapPin",
                "title": "Venue & Logistics",
                "description": "Directions, parking, accommodations, and everything you need to get there stress-free.",
            },
            {
                "icon": "Users",
                "title": "Networking",
                "description": "Connect with like-minded attendees, speakers, and industry leaders.",
            },
            {
                "icon": "Sparkles",
                "title": "Exclusive Perks",
                "description": "VIP access, early-bird pricing, and special bonuses for registered attendees.",
            },
        ),
        testimonials=(
            {
                "quote": "Best event I attended all year. The organization was flawless, the speakers were inspiring, and the networking opportunities were incredible.",
                "name": "Jason Wright",
                "role": "Attendee",
                "rating": 5,
            },
            {
                "quote": "From registration to the final session, everything was seamless. Already looking forward to next year.",
                "name": "Sophia Lin",
                "role": "VIP Ticket Holder",
                "rating": 5,
            },
            {
                "quote": "The caliber of speakers and the energy of the crowd made this a truly unforgettable experience. Worth every penny.",
                "name": "Michael Osei",
                "role": "Repeat Attendee",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} brings together passionate people for an experience that inspires, "
            "connects, and energizes. Whether you're a first-timer or a returning attendee, there's something "
            "extraordinary waiting for you.</p>"
        ),
    ),
    "landing": IndustryContent(
        taglines={
            "contact": "Take the first step today",
            "inform": "Everything you need, one page",
            "convert": "Join thousands who already have",
            "sell": "Limited time — act now",
        },
        headline_template="{name} — The Smarter Way Forward",
        features=(
            {
                "icon": "Zap",
                "title": "Quick Results",
                "description": "See real results faster than you thought possible with our proven approach.",
            },
            {
                "icon": "Shield",
                "title": "Risk-Free",
                "description": "Try it with confidence. Our guarantee means you have nothing to lose.",
            },
            {
                "icon": "TrendingUp",
                "title": "Proven Track Record",
                "description": "Thousands of satisfied customers can't be wrong. See the numbers for yourself.",
            },
            {
                "icon": "CheckCircle",
                "title": "Simple Process",
                "description": "No complicated setup. Get started in minutes and see results right away.",
            },
        ),
        testimonials=(
            {
                "quote": "Signed up on a whim and it turned out to be one of the best decisions I've made this year. The results were immediate and measurable.",
                "name": "Alex Rivera",
                "role": "Early Adopter",
                "rating": 5,
            },
            {
                "quote": "I was skeptical at first, but the results spoke for themselves. Wish I'd started sooner.",
                "name": "Jasmine Powell",
                "role": "Customer",
                "rating": 5,
            },
            {
                "quote": "Simple to get started, powerful results. Exactly what was promised — no fluff, no hidden catches.",
                "name": "Derek Huang",
                "role": "Verified User",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} was built to solve a real problem with a straightforward solution. "
            "No gimmicks, no unnecessary complexity — just results.</p>"
        ),
    ),
    # Sub-type entries
    "restaurant": IndustryContent(
        taglines={
            "contact": "Reserve your table tonight",
            "book": "Make a reservation",
            "showcase": "A culinary experience like no other",
            "sell": "Savor every moment",
        },
        headline_template="{name} — Where Every Dish Tells a Story",
        features=(
            {
                "icon": "ChefHat",
                "title": "Chef-Crafted Menu",
                "description": "Every dish is thoughtfully composed by our culinary team using the finest seasonal ingredients.",
            },
            {
                "icon": "Wine",
                "title": "Curated Pairings",
                "description": "Our sommelier selects wines and cocktails that elevate each course into a complete experience.",
            },
            {
                "icon": "Flame",
                "title": "From Scratch, Daily",
                "description": "Sauces, breads, and pastas made fresh in-house every morning. You can taste the difference.",
            },
            {
                "icon": "Sparkles",
                "title": "Unforgettable Ambiance",
                "description": "Warm lighting, curated music, and thoughtful design create the perfect atmosphere for any occasion.",
            },
        ),
        testimonials=(
            {
                "quote": "The mole negro was transcendent — layers of flavor I've never experienced anywhere else. This is destination dining.",
                "name": "Sofia Marquez",
                "role": "Food Critic, City Eats",
                "rating": 5,
            },
            {
                "quote": "We celebrated our anniversary here and every detail was perfect. The tasting menu was a journey from start to finish.",
                "name": "James & Patricia Wells",
                "role": "Anniversary Dinner",
                "rating": 5,
            },
            {
                "quote": "I've traveled the world for food and this place competes with the best. The passion in every plate is undeniable.",
                "name": "Carlos Ibarra",
                "role": "Regular Guest",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>At {name}, dining is more than a meal — it's an experience crafted with "
            "intention, seasonality, and deep respect for culinary tradition. Every plate reflects our "
            "commitment to excellence.</p>"
        ),
    ),
    "spa": IndustryContent(
        taglines={
            "contact": "Begin your wellness journey",
            "book": "Book your escape today",
            "showcase": "Restore, rejuvenate, reconnect",
            "sell": "The renewal you deserve",
        },
        headline_template="{name} — A Sanctuary for Mind and Body",
        features=(
            {
                "icon": "Leaf",
                "title": "Holistic Approach",
                "description": "Treatments designed to restore balance to your entire being — body, mind, and spirit.",
            },
            {
                "icon": "Droplets",
                "title": "Premium Products",
                "description": "We use only organic, sustainably sourced products that nourish your skin and respect the environment.",
            },
            {
                "icon": "Heart",
                "title": "Expert Therapists",
                "description": "Our licensed therapists bring years of specialized training and genuine care to every session.",
            },
            {
                "icon": "Sparkles",
                "title": "Serene Environment",
                "description": "Purpose-built treatment rooms, aromatherapy, and ambient soundscapes create your perfect escape.",
            },
        ),
        testimonials=(
            {
                "quote": "I walked in carrying the stress of a month and walked out feeling like a completely different person. The deep tissue massage was exactly what I needed.",
                "name": "Amanda Chen",
                "role": "Monthly Member",
                "rating": 5,
            },
            {
                "quote": "The attention to detail here is extraordinary — from the herbal tea on arrival to the personalized treatment plan. True luxury.",
                "name": "David Okafor",
                "role": "First-Time Guest",
                "rating": 5,
            },
            {
                "quote": "I've tried spas all over the city and nothing compares. The therapists actually listen and customize every session.",
                "name": "Rachel Kim",
                "role": "Regular Client",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} is a sanctuary where expert care meets intentional design. Every "
            "detail — from the products we use to the atmosphere we create — is chosen to help you find "
            "stillness, renewal, and balance.</p>"
        ),
    ),
    "photography": IndustryContent(
        taglines={
            "contact": "Let's capture your story",
            "hire": "Book your session today",
            "showcase": "Moments preserved, stories told",
            "attention": "Images that move people",
        },
        headline_template="{name} — Capturing Moments That Matter",
        features=(
            {
                "icon": "Camera",
                "title": "Artistic Vision",
                "description": "Every shoot is guided by a distinctive creative eye that finds beauty in authentic moments.",
            },
            {
                "icon": "Sun",
                "title": "Natural Light Mastery",
                "description": "Expert use of natural and ambient light creates images that feel alive, warm, and timeless.",
            },
            {
                "icon": "Image",
                "title": "Professional Editing",
                "description": "Meticulous post-production ensures every image meets gallery-quality standards while staying true to the moment.",
            },
            {
                "icon": "Clock",
                "title": "Fast Turnaround",
                "description": "Preview gallery within 48 hours, fully edited collection delivered in two weeks or less.",
            },
        ),
        testimonials=(
            {
                "quote": "They captured our wedding in a way that makes us relive every emotion. These aren't just photos — they're heirlooms.",
                "name": "Maria & Tom Ashford",
                "role": "Wedding Clients",
                "rating": 5,
            },
            {
                "quote": "My headshots completely transformed my professional brand. I've gotten more inquiries in two months than the previous year.",
                "name": "Darnell Brooks",
                "role": "Executive Portrait",
                "rating": 5,
            },
            {
                "quote": "The family session was so relaxed and natural. The kids were laughing the whole time and the photos show genuine joy — not forced smiles.",
                "name": "Lin Nakamura",
                "role": "Family Session",
                "rating": 5,
            },
        ),
        about_template=(
            "<p>{description}</p><p>{name} believes that photography is the art of seeing what others overlook. "
            "Every session is a collaboration — blending your story with a creative vision that produces "
            "images you'll treasure for a lifetime.</p>"
        ),
    ),
}


DEFAULT_STATS: Mapping[str, Sequence[Mapping[str, Any]]] = {
    "restaurant": (
        {"value": 50000, "label": "Guests Served", "suffix": "+"},
        {"value": 15, "label": "Years of Tradition", "suffix": "+"},
        {"value": 98, "label": "Guest Satisfaction", "suffix": "%"},
        {"value": 24, "label": "Signature Dishes"},
    ),
    "spa": (
        {"value": 20000, "label": "Treatments Given", "suffix": "+"},
        {"value": 99, "label": "Client Satisfaction", "suffix": "%"},
        {"value": 12, "label": "Licensed Therapists"},
        {"value": 10, "label": "Years of Wellness", "suffix": "+"},
    ),
    "photography": (
        {"value": 2000, "label": "Sessions Completed", "suffix": "+"},
        {"value": 500, "label": "Happy Clients", "suffix": "+"},
        {"value": 8, "label": "Years of Experience", "suffix": "+"},
        {"value": 15, "label": "Awards Won"},
    ),
    "business": (
        {"value": 500, "label": "Clients Served", "suffix": "+"},
        {"value": 98, "label": "Satisfaction Rate", "suffix": "%"},
        {"value": 12, "label": "Years of Experience", "suffix": "+"},
        {"value": 50, "label": "Team Members"},
    ),
    "booking": (
        {"value": 10000, "label": "Appointments Booked", "suffix": "+"},
        {"value": 49, "label": "Average Rating"},
        {"value": 8, "label": "Years in Business", "suffix": "+"},
        {"value": 99, "label": "Return Clients", "suffix": "%"},
    ),
    "ecommerce": (
        {"value": 25000, "label": "Happy Customers", "suffix": "+"},
        {"value": 48, "label": "Average Review"},
        {"value": 48, "label": "Hour Shipping", "suffix": "h"},
        {"value": 30, "label": "Day Returns"},
    ),
    "educational": (
        {"value": 5000, "label": "Students Enrolled", "suffix": "+"},
        {"value": 95, "label": "Completion Rate", "suffix": "%"},
        {"value": 200, "label": "Courses Available", "suffix": "+"},
        {"value": 49, "label": "Student Rating"},
    ),
    "nonprofit": (
        {"value": 100000, "label": "Lives Impacted", "suffix": "+"},
        {"value": 15, "label": "Years of Service"},
        {"value": 92, "label": "Funds to Mission", "suffix": "%"},
        {"value": 2500, "label": "Volunteers", "suffix": "+"},
    ),
}


# "business" holds the subscription plans every other site type falls back to.
DEFAULT_SERVICES: Mapping[str, Sequence[Mapping[str, Any]]] = {
    "restaurant": (
        {
            "name": "Tasting Menu",
            "description": "A seven-course journey through our chef's seasonal inspirations, paired with hand-selected wines.",
            "price": "$125/person",
            "icon": "Sparkles",
            "featured": True,
        },
        {
            "name": "Chef's Table",
            "description": "An intimate dining experience in our kitchen with a custom menu and direct access to the culinary team.",
            "price": "$185/person",
            "icon": "ChefHat",
        },
        {
            "name": "Private Dining",
            "description": "Exclusive use of our private dining room for groups of 8-20, with a curated menu tailored to your occasion.",
            "price": "From $95/person",
            "icon": "Users",
        },
        {
            "name": "Weekend Brunch",
            "description": "A leisurely three-course brunch featuring seasonal dishes, fresh pastries, and bottomless mimosas.",
            "price": "$55/person",
            "icon": "Sun",
        },
    ),
    "spa": (
        {
            "name": "Signature Massage",
            "description": "Our signature full-body massage combining Swedish and deep tissue techniques for total relaxation.",
            "price": "$120",
            "icon": "Heart",
            "featured": True,
        },
        {
            "name": "Deep Tissue Therapy",
            "description": "Targeted pressure therapy to release chronic tension and restore mobility in problem areas.",
            "price": "$140",
            "icon": "Zap",
        },
        {
            "name": "Hot Stone Ritual",
            "description": "Heated basalt stones melt tension while essential oils soothe the senses in this luxurious treatment.",
            "price": "$155",
            "icon": "Flame",
        },
        {
            "name": "Facial Rejuvenation",
            "description": "A customized facial using organic products to cleanse, exfoliate, and restore your natural glow.",
            "price": "$95",
            "icon": "Sparkles",
        },
    ),
    "photography": (
        {
            "name": "Portrait Session",
            "description": "A one-hour session in studio or on location, with 15 professionally edited images delivered digitally.",
            "price": "$350",
            "icon": "Camera",
        },
        {
            "name": "Wedding Package",
            "description": "Full-day coverage from preparation to reception, with a second photographer and 400+ edited images.",
            "price": "From $3,500",
            "icon": "Heart",
            "featured": True,
        },
        {
            "name": "Commercial Shoot",
            "description": "Half or full-day product and brand photography with art direction and usage licensing included.",
            "price": "From $1,200",
            "icon": "Briefcase",
        },
        {
            "name": "Family Session",
            "description": "A relaxed 90-minute session at your favorite outdoor location, with 25 edited images.",
            "price": "$450",
            "icon": "Users",
        },
    ),
    "booking": (
        {
            "name": "Standard Session",
            "description": "Our most popular option — perfect for regular appointments.",
            "price": "$45",
            "icon": "Clock",
        },
        {
            "name": "Premium Experience",
            "description": "Extended session with premium products and extra attention to detail.",
            "price": "$75",
            "icon": "Star",
            "featured": True,
        },
        {
            "name": "Express Service",
            "description": "Quick and efficient for busy schedules. In and out in 30 minutes.",
            "price": "$30",
            "icon": "Zap",
        },
        {
            "name": "VIP Package",
            "description": "The ultimate experience with complimentary extras and priority scheduling.",
            "price": "$120",
            "icon": "Award",
        },
    ),
    "business": (
        {
            "name": "Starter Plan",
            "description": "Everything you need to get started with core features included.",
            "price": "$29/mo",
            "icon": "Package",
        },
        {
            "name": "Professional",
            "description": "Advanced features for growing businesses and teams.",
            "price": "$79/mo",
            "icon": "Briefcase",
            "featured": True,
        },
        {
            "name": "Enterprise",
            "description": "Custom solutions with dedicated support and premium features.",
            "price": "Custom",
            "icon": "Shield",
        },
    ),
}


DEFAULT_TEAM: Mapping[str, Sequence[Mapping[str, str]]] = {
    "restaurant": (
        {
            "name": "Marco Reyes",
            "role": "Executive Chef",
            "bio": "Trained in Mexico City and Lyon, bringing 20 years of culinary mastery to every dish.",
        },
        {
            "name": "Isabella Torres",
            "role": "Sous Chef",
            "bio": "Specializing in seasonal ingredients and innovative flavor combinations.",
        },
        {
            "name": "David Hernandez",
            "role": "Sommelier",
            "bio": "Curating wine pairings that elevate every course into a complete experience.",
        },
        {
            "name": "Ana Gutierrez",
            "role": "Restaurant Manager",
            "bio": "Ensuring every guest feels welcomed, valued, and delighted from the moment they arrive.",
        },
    ),
    "spa": (
        {
            "name": "Elena Vasquez",
            "role": "Lead Massage Therapist",
            "bio": "Licensed in five modalities with a healing touch perfected over 15 years.",
        },
        {
            "name": "Dr. Sarah Lin",
            "role": "Wellness Director",
            "bio": "Integrative health specialist designing personalized treatment protocols.",
        },
        {
            "name": "Maya Johnson",
            "role": "Esthetician",
            "bio": "Expert in organic skincare and anti-aging treatments with a loyal client following.",
        },
        {
            "name": "Jordan Okafor",
            "role": "Holistic Practitioner",
            "bio": "Combining ancient wisdom with modern techniques for whole-body wellness.",
        },
    ),
    "photography": (
        {
            "name": "Alex Rivera",
            "role": "Lead Photographer",
            "bio": "An award-winning eye for light, composition, and authentic human moments.",
        },
        {
            "name": "Sam Nguyen",
            "role": "Second Shooter",
            "bio": "Capturing candid moments and alternative angles that tell the complete story.",
        },
        {
            "name": "Jordan Park",
            "role": "Photo Editor",
            "bio": "Meticulous post-production that brings every image to its full potential.",
        },
    ),
    "personal": (
        {
            "name": "Jordan Rivera",
            "role": "Design Partner",
            "bio": "Bringing visual concepts to life with precision and creativity.",
        },
        {
            "name": "Alex Kim",
            "role": "Strategy Advisor",
            "bio": "Helping shape brand direction and growth strategy.",
        },
        {
            "name": "Sam Chen",
            "role": "Development Lead",
            "bio": "Turning ideas into functional, beautiful digital products.",
        },
    ),
    "business": (
        {
            "name": "Alex Morgan",
            "role": "Founder & CEO",
            "bio": "Leading the vision with over a decade of industry experience.",
        },
        {
            "name": "Jordan Lee",
            "role": "Creative Director",
            "bio": "Crafting memorable brand experiences that resonate with audiences.",
        },
        {
            "name": "Taylor Brooks",
            "role": "Head of Operations",
            "bio": "Ensuring seamless delivery and exceptional client satisfaction.",
        },
        {
            "name": "Casey Rivera",
            "role": "Lead Strategist",
            "bio": "Turning data into actionable insights that drive real results.",
        },
    ),
}


DEFAULT_TRUST_LOGOS: Mapping[str, Sequence[Mapping[str, str]]] = {
    "educational": (
        {"name": "Stanford University"},
        {"name": "MIT"},
        {"name": "Google"},
        {"name": "Microsoft"},
        {"name": "Coursera"},
        {"name": "edX"},
    ),
    "business": (
        {"name": "Forbes"},
        {"name": "TechCrunch"},
        {"name": "Product Hunt"},
        {"name": "Y Combinator"},
        {"name": "Bloomberg"},
        {"name": "Wired"},
    ),
}


# Answers are templates; "{name}" is the business name.
DEFAULT_FAQ: Mapping[str, Sequence[Mapping[str, str]]] = {
    "restaurant": (
        {
            "question": "Do I need a reservation?",
            "answer": "<p>Reservations are strongly recommended, especially for weekend evenings. Walk-ins are welcome but subject to availability. You can reserve online or call us directly.</p>",
        },
        {
            "question": "Do you accommodate dietary restrictions?",
            "answer": "<p>Absolutely. Our kitchen is experienced with vegetarian, vegan, gluten-free, and allergen-sensitive preparations. Please mention any dietary needs when booking and your server will guide you through the menu.</p>",
        },
        {
            "question": "Is there a dress code?",
            "answer": "<p>We encourage smart casual attire. While we want you to feel comfortable, we ask that guests avoid athletic wear and flip-flops to preserve the ambiance for everyone.</p>",
        },
        {
            "question": "Can you host private events?",
            "answer": "<p>Yes! {name} offers private dining for groups of 8-40 guests. We create custom menus for weddings, corporate events, birthdays, and special celebrations. Contact us for details.</p>",
        },
    ),
    "spa": (
        {
            "question": "What should I expect during my first visit?",
            "answer": "<p>Arrive 15 minutes early to complete a brief wellness questionnaire. You'll receive a robe, slippers, and a tour of our facilities. Your therapist will discuss your needs before the treatment begins.</p>",
        },
        {
            "question": "What is your cancellation policy?",
            "answer": "<p>We require 24 hours notice for cancellations or rescheduling. Late cancellations or no-shows may be charged 50% of the treatment price.</p>",
        },
        {
            "question": "Are there health conditions that prevent treatment?",
            "answer": "<p>Certain conditions may require a doctor's note or modified treatment. Please inform us of any health conditions, allergies, or medications when booking so we can ensure your safety and comfort.</p>",
        },
        {
            "question": "Do you offer gift cards?",
            "answer": "<p>Yes! {name} gift cards are available in any amount and make a thoughtful gift. They can be used for any treatment or product and never expire.</p>",
        },
    ),
    "photography": (
        {
            "question": "How far in advance should I book?",
            "answer": "<p>For weddings, we recommend 6-12 months in advance. Portrait and family sessions can usually be booked 2-4 weeks out. Contact us for current availability.</p>",
        },
        {
            "question": "How long until I receive my photos?",
            "answer": "<p>A preview gallery of 20-30 images is delivered within 48 hours. Your full edited collection is typically ready within 2-3 weeks, depending on the session type.</p>",
        },
        {
            "question": "Do you provide prints and albums?",
            "answer": "<p>Yes! We offer museum-quality prints, custom-designed albums, and canvas wraps. These can be ordered through your private online gallery after delivery.</p>",
        },
        {
            "question": "Can I use the photos on social media?",
            "answer": "<p>Absolutely. All personal session packages include a social media usage license. Commercial usage licensing is included in commercial packages or available as an add-on.</p>",
        },
    ),
    "booking": (
        {
            "question": "How do I book an appointment?",
            "answer": "<p>You can book online through our website 24/7, or call us during business hours. We recommend booking at least 48 hours in advance for your preferred time slot.</p>",
        },
        {
            "question": "What is your cancellation policy?",
            "answer": "<p>We understand plans change. Please give us at least 24 hours notice for cancellations. Late cancellations may incur a fee of 50% of the service price.</p>",
        },
        {
            "question": "Do you offer gift cards?",
            "answer": "<p>Yes! {name} gift cards are available in any denomination and make the perfect gift for any occasion. They can be purchased in-store or online.</p>",
        },
        {
            "question": "What forms of payment do you accept?",
            "answer": "<p>We accept all major credit cards, debit cards, Apple Pay, and Google Pay. Cash is also welcome.</p>",
        },
    ),
    "ecommerce": (
        {
            "question": "What is your shipping policy?",
            "answer": "<p>We offer free shipping on orders over $50. Standard shipping (3-5 business days) is $5.99, and express shipping (1-2 business days) is $12.99.</p>",
        },
        {
            "question": "How do I return an item?",
            "answer": "<p>Returns are accepted within 30 days of delivery. Items must be in original condition with tags attached. We provide a prepaid return label for your convenience.</p>",
        },
        {
            "question": "Do you ship internationally?",
            "answer": "<p>Yes, {name} ships to over 50 countries worldwide. International shipping rates and delivery times vary by destination.</p>",
        },
        {
            "question": "How can I track my order?",
            "answer": "<p>Once your order ships, you'll receive an email with a tracking number. You can also check your order status in your account dashboard.</p>",
        },
    ),
    "educational": (
        {
            "question": "Are the courses self-paced?",
            "answer": "<p>Most of our courses are self-paced, allowing you to learn on your own schedule. Some live cohort courses have set schedules for interactive sessions.</p>",
        },
        {
            "question": "Do I get a certificate upon completion?",
            "answer": "<p>Yes! All {name} courses include a verified certificate upon successful completion that you can add to your resume or LinkedIn profile.</p>",
        },
        {
            "question": "What if I'm not satisfied with a course?",
            "answer": "<p>We offer a 30-day money-back guarantee on all courses. If you're not satisfied, contact our support team for a full refund.</p>",
        },
        {
            "question": "Can I access courses on mobile devices?",
            "answer": "<p>Absolutely. Our platform is fully responsive and works on smartphones, tablets, and desktops. We also offer a dedicated mobile app.</p>",
        },
    ),
    "event": (
        {
            "question": "What's included in my ticket?",
            "answer": "<p>Your ticket includes full access to all sessions, keynotes, and networking events. VIP tickets also include exclusive workshops, priority seating, and a swag bag.</p>",
        },
        {
            "question": "Is there a group discount?",
            "answer": "<p>Yes! Groups of 5 or more receive a 15% discount, and groups of 10+ receive 25% off. Contact us for custom group pricing.</p>",
        },
        {
            "question": "What is the refund policy?",
            "answer": "<p>Full refunds are available up to 30 days before the event. After that, tickets can be transferred to another attendee at no charge.</p>",
        },
        {
            "question": "Will sessions be recorded?",
            "answer": "<p>Yes, all main stage sessions will be recorded and made available to ticket holders within 48 hours of the event.</p>",
        },
    ),
    "nonprofit": (
        {
            "question": "How are donations used?",
            "answer": "<p>92% of all donations go directly to our programs and mission. We publish detailed annual reports showing exactly how every dollar is spent.</p>",
        },
        {
            "question": "Is my donation tax-deductible?",
            "answer": "<p>Yes, {name} is a registered 501(c)(3) nonprofit organization. All donations are tax-deductible to the fullest extent allowed by law.</p>",
        },
        {
            "question": "How can I volunteer?",
            "answer": "<p>We'd love to have you! Visit our volunteer page to see current opportunities, or contact us directly to discuss how your skills can make a difference.</p>",
        },
        {
            "question": "Can I set up a recurring donation?",
            "answer": "<p>Absolutely. Monthly recurring donations help us plan ahead and maximize impact. You can set up recurring giving through our secure online portal.</p>",
        },
    ),
}


def _links(*pairs: tuple[str, str]) -> tuple[Mapping[str, str], ...]:
    return tuple({"label": label, "href": href} for label, href in pairs)


DEFAULT_NAV_LINKS: Mapping[str, Sequence[Mapping[str, str]]] = {
    "restaurant": _links(("Home", "#"), ("Our Story", "#about"), ("Menu", "#services"), ("Reservations", "#contact")),
    "spa": _links(("Home", "#"), ("About", "#about"), ("Treatments", "#services"), ("Book Now", "#contact")),
    "photography": _links(("Home", "#"), ("About", "#about"), ("Portfolio", "#services"), ("Book a Session", "#contact")),
    "portfolio": _links(("Home", "#"), ("About", "#about"), ("Work", "#services"), ("Contact", "#contact")),
    "ecommerce": _links(("Home", "#"), ("About", "#about"), ("Products", "#services"), ("Contact", "#contact")),
    "blog": _links(("Home", "#"), ("About", "#about"), ("Articles", "#services"), ("Subscribe", "#contact")),
    "nonprofit": _links(("Home", "#"), ("Our Mission", "#about"), ("Programs", "#services"), ("Donate", "#contact")),
    "event": _links(("Home", "#"), ("About", "#about"), ("Schedule", "#services"), ("Register", "#contact")),
    "educational": _links(("Home", "#"), ("About", "#about"), ("Courses", "#services"), ("Enroll", "#contact")),
    "business": _links(("Home", "#"), ("About", "#about"), ("Services", "#services"), ("Contact", "#contact")),
}


@dataclass(frozen=True)
class SectionCopy:
    """Eyebrows and headline pairs for the structural blocks, keyed by sub-type or site type.

    Templates may reference ``{name}`` (the business name). Each table has a
    ``default`` entry used when neither the sub-type nor the site type is present.
    """

    about_eyebrows: Mapping[str, str]
    services_eyebrows: Mapping[str, str]
    services_headlines: Mapping[str, str]
    commerce_headlines: Mapping[str, tuple[str, str]]
    team_headlines: Mapping[str, tuple[str, str]]
    testimonial_eyebrows: Mapping[str, str]
    testimonial_headlines: Mapping[str, str]
    cta_headlines_by_sub_type: Mapping[str, Mapping[str, str]]
    cta_headlines: Mapping[str, str]
    contact_headlines: Mapping[str, str]
    contact_subheadlines: Mapping[str, str]


DEFAULT_SECTION_COPY = SectionCopy(
    about_eyebrows={
        "restaurant": "Our Story",
        "photography": "The Photographer",
        "personal": "About Me",
        "default": "About Us",
    },
    services_eyebrows={
        "restaurant": "The Experience",
        "spa": "Our Treatments",
        "photography": "Our Craft",
        "business": "Our Services",
        "portfolio": "What I Do",
        "ecommerce": "Why Choose Us",
        "booking": "Our Services",
        "default": "What We Offer",
    },
    services_headlines={
        "restaurant": "A Menu Crafted with Passion",
        "spa": "Treatments Tailored to You",
        "photography": "Services for Every Occasion",
        "business": "Services That Drive Results",
        "portfolio": "Areas of Expertise",
        "ecommerce": "The Difference We Make",
        "booking": "What We Offer",
        "default": "What Makes Us Different",
    },
    commerce_headlines={
        "restaurant": ("Our Menu", "Signature dishes crafted with passion"),
        "spa": ("Our Treatments", "Personalized wellness experiences"),
        "photography": ("Packages & Sessions", "Find the perfect package for your vision"),
        "booking": ("Our Services", "Choose the perfect service for you"),
        "default": ("What We Offer", "Explore our offerings"),
    },
    team_headlines={
        "restaurant": ("Our Culinary Team", "The talent behind {name}"),
        "spa": ("Our Wellness Experts", "Dedicated professionals who care"),
        "photography": ("The Creative Team", "The artists behind the lens"),
        "personal": ("Collaborators", "People I love working with"),
        "default": ("Meet the Team", "The people behind {name}"),
    },
    testimonial_eyebrows={
        "restaurant": "Guest Reviews",
        "spa": "Client Experiences",
        "photography": "Client Love",
        "default": "Testimonials",
    },
    testimonial_headlines={
        "restaurant": "What Our Guests Say",
        "spa": "What Our Clients Experience",
        "default": "What Our Clients Say",
    },
    cta_headlines_by_sub_type={
        "restaurant": {"book": "Reserve Your Table Tonight", "contact": "We'd Love to Host You"},
        "spa": {"book": "Book Your Treatment Today", "contact": "Begin Your Wellness Journey"},
        "photography": {"book": "Book Your Session", "contact": "Let's Plan Your Shoot"},
    },
    cta_headlines={
        "contact": "Ready to Start Your Project?",
        "book": "Book Your Appointment Today",
        "showcase": "Let's Work Together",
        "sell": "Start Shopping Today",
        "hire": "Let's Create Something Amazing",
        "convert": "Join Thousands of Happy Customers",
        "default": "Ready to Get Started?",
    },
    contact_headlines={
        "restaurant": "Make a Reservation",
        "spa": "Book Your Appointment",
        "photography": "Let's Plan Your Session",
        "default": "Get in Touch",
    },
    contact_subheadlines={
        "restaurant": "Reserve your table at {name}. We look forward to welcoming you.",
        "spa": "Schedule your next treatment at {name}. Your wellness journey starts here.",
        "photography": "Tell us about your vision and we'll craft the perfect session for you.",
        "default": "Ready to get started? Drop us a message and we'll get back to you within 24 hours.",
    },
)


@dataclass(frozen=True)
class ContentCatalog:
    industries: Mapping[str, IndustryContent]
    stats: Mapping[str, Sequence[Mapping[str, Any]]]
    services: Mapping[str, Sequence[Mapping[str, Any]]]
    team: Mapping[str, Sequence[Mapping[str, str]]]
    trust_logos: Mapping[str, Sequence[Mapping[str, str]]]
    faq: Mapping[str, Sequence[Mapping[str, str]]]
    nav_links: Mapping[str, Sequence[Mapping[str, str]]]
    copy: SectionCopy
    default_tagline: str = DEFAULT_TAGLINE
    faq_fallback: str = "booking"

    def industry(self, sub_type: str, site_type: str) -> IndustryContent:
        return _resolve(self.industries, sub_type, site_type, DEFAULT_KEY)

    def tagline(self, industry: IndustryContent, goal: str) -> str:
        return industry.taglines.get(goal) or self.default_tagline

    def stats_for(self, sub_type: str, site_type: str) -> list[dict[str, Any]]:
        return _copy_rows(_resolve(self.stats, sub_type, site_type, DEFAULT_KEY, default=()))

    def services_for(self, sub_type: str, site_type: str) -> list[dict[str, Any]]:
        return _copy_rows(_resolve(self.services, sub_type, site_type, DEFAULT_KEY, default=()))

    def team_for(self, sub_type: str, site_type: str) -> list[dict[str, Any]]:
        return _copy_rows(_resolve(self.team, sub_type, site_type, DEFAULT_KEY, default=()))

    def trust_logos_for(self, site_type: str) -> list[dict[str, Any]]:
        return _copy_rows(_resolve(self.trust_logos, site_type, DEFAULT_KEY, default=()))

    def faq_for(self, sub_type: str, site_type: str, business_name: str) -> list[dict[str, Any]]:
        rows = _resolve(self.faq, sub_type, site_type, self.faq_fallback, default=())
        return [
            {**row, "answer": row["answer"].format(name=business_name)}
            for row in rows
        ]

    def nav_links_for(self, sub_type: str, site_type: str) -> list[dict[str, Any]]:
        return _copy_rows(_resolve(self.nav_links, sub_type, site_type, DEFAULT_KEY, default=()))

    def section_copy(self, table: str, *keys: str | None, name: str = "") -> Any:
        """Look up one ``SectionCopy`` table, formatting ``{name}`` in the result."""
        entries: Mapping[str, Any] = getattr(self.copy, table)
        value = _resolve(entries, *keys, "default")
        if isinstance(value, tuple):
            return tuple(part.format(name=name) for part in value)
        return value.format(name=name)

    def cta_headline(self, goal: str, sub_type: str | None = None) -> str:
        by_goal = self.copy.cta_headlines_by_sub_type.get(sub_type or "", {})
        if goal in by_goal:
            return by_goal[goal]
        return _resolve(self.copy.cta_headlines, goal, "default")


def _copy_rows(rows: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [dict(row) for row in rows]


def default_content_catalog() -> ContentCatalog:
    return ContentCatalog(
        industries=DEFAULT_INDUSTRY_CONTENT,
        stats=DEFAULT_STATS,
        services=DEFAULT_SERVICES,
        team=DEFAULT_TEAM,
        trust_logos=DEFAULT_TRUST_LOGOS,
        faq=DEFAULT_FAQ,
        nav_links=DEFAULT_NAV_LINKS,
        copy=DEFAULT_SECTION_COPY,
    )


__all__ = [
    "SUPPORTED_SITE_TYPES",
    "DEFAULT_TAGLINE",
    "DEFAULT_INDUSTRY_CONTENT",
    "DEFAULT_STATS",
    "DEFAULT_SERVICES",
    "DEFAULT_TEAM",
    "DEFAULT_TRUST_LOGOS",
    "DEFAULT_FAQ",
    "DEFAULT_NAV_LINKS",
    "DEFAULT_SECTION_COPY",
    "IndustryContent",
    "SectionCopy",
    "ContentCatalog",
    "resolution_order",
    "default_content_catalog",
]
